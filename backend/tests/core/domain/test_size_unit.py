from core.domain.size_unit import SizeUnit
from core.domain.string_key import StringKey


def test_size_unit_tiers_chain_up_to_petabyte() -> None:
    chain = [SizeUnit.BYTE]
    while chain[-1].next is not None:
        chain.append(chain[-1].next)

    assert chain == list(SizeUnit)
    assert SizeUnit.PETABYTE.next is None


def test_size_unit_maps_to_short_unit_strings() -> None:
    assert SizeUnit.BYTE.string_key is StringKey.BYTE_SHORT
    assert SizeUnit.MEGABYTE.string_key is StringKey.MEGABYTE_SHORT
    assert SizeUnit.PETABYTE.string_key is StringKey.PETABYTE_SHORT
