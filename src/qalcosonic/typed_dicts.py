# We use typed dicts rather than data classes because the network server wants dicts

from typing import TypeAlias, TypedDict

_ScaledT: TypeAlias = int | float

__all__ = ["ErrorCodeT", "PayDictT", "UplinkResultT"]


class ErrorCodeT(TypedDict):
    code: str
    description: str


class _BasicLT(TypedDict):
    payloadtype: str
    timestamp: int
    errorcodes: ErrorCodeT
    energyheatpp: int
    energycoolpp: int
    volumepp: int
    powerpp: _ScaledT
    flowpp: _ScaledT
    temp1pp: _ScaledT
    temp2pp: _ScaledT
    workingtime: int
    storeperiod: int


class _BasicWithHeat(TypedDict):
    payloadtype: str
    timestamp: int
    errorcodes: ErrorCodeT
    energyheat: int
    volume: int
    energyheatpp1: int
    volumepp1: int
    energyheatpp2: int
    volumepp2: int
    energyheatpp3: int
    volumepp3: int
    storeperiod: int


class _BasicWithCool(TypedDict):
    payloadtype: str
    timestamp: int
    errorcodes: ErrorCodeT
    energyheat: int
    energycool: int
    volume: int
    energyheatpp1: int
    energycoolpp1: int
    volumepp1: int
    energyheatpp2: int
    energycoolpp2: int
    volumepp2: int
    storeperiod: int


class _Nordic(TypedDict):
    payloadtype: str
    timestamp: int
    timestamppp1: int
    energypp1: int
    volumepp1: int
    powerpp1: _ScaledT
    flowpp1: _ScaledT
    temp1pp1: _ScaledT
    temp2pp1: _ScaledT
    timestamppp2: int
    energypp2: int
    volumepp2: int
    powerpp2: _ScaledT
    flowpp2: _ScaledT
    temp1pp2: _ScaledT
    temp2pp2: _ScaledT


class _NordicWithCool(TypedDict):
    payloadtype: str
    timestamp: int
    timestamppp1: int
    energyhpp1: int
    energycpp1: int
    volumepp1: int
    powerpp1: _ScaledT
    flowpp1: _ScaledT
    temp1pp1: _ScaledT
    temp2pp1: _ScaledT


class PayDictT:
    """Payload dict types."""

    BASIC_LT: TypeAlias = _BasicLT
    BASIC_WITH_HEAT: TypeAlias = _BasicWithHeat
    BASIC_WITH_COOL: TypeAlias = _BasicWithCool
    NORDIC: TypeAlias = _Nordic
    NORDIC_WITH_COOL: TypeAlias = _NordicWithCool

    ANY: TypeAlias = (
        _BasicLT | _BasicWithHeat | _BasicWithCool | _Nordic | _NordicWithCool
    )


class UplinkResultT(TypedDict, total=False):
    data: PayDictT.ANY
    errors: list[str]
    warnings: list[str]
