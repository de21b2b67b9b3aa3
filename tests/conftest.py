"""Shared fixtures for cfgstore tests."""

from decimal import Decimal
from typing import Any, Callable, Dict

import pytest

from cfgstore.settings import (
    BoolSetting,
    ByteSetting,
    CharSetting,
    DecimalSetting,
    DoubleSetting,
    FloatSetting,
    IntSetting,
    LongSetting,
    NDecimalSetting,
    NDoubleSetting,
    NFloatSetting,
    Setting,
    ShortSetting,
    StringSetting,
    UIntSetting,
    ULongSetting,
    UShortSetting,
)


def build_mixed_catalog() -> Dict[str, Setting[Any]]:
    return {
        "letter": CharSetting("x"),
        "title": StringSetting("main"),
        "level": ByteSetting(3),
        "offset": ShortSetting(-12),
        "port": UShortSetting(8080),
        "count": IntSetting(42),
        "mask": UIntSetting(0xDEADBEEF),
        "epoch": LongSetting(-(2 ** 40)),
        "size": ULongSetting(2 ** 63),
        "ratio": FloatSetting(1.25),
        "scale": DoubleSetting(0.1),
        "price": DecimalSetting(Decimal("19.99")),
        "enabled": BoolSetting(True),
        "volume": NFloatSetting(0.5),
        "balance": NDoubleSetting(0.75),
        "share": NDecimalSetting(Decimal("0.125")),
    }


@pytest.fixture
def mixed_catalog() -> Callable[[], Dict[str, Setting[Any]]]:
    """Catalog function covering every setting variant."""
    return build_mixed_catalog
