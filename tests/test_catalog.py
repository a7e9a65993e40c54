import pytest

from status_responses import catalog
from status_responses.status import StatusCategory
from status_responses.status import StatusCode


def test_catalog_covers_every_status_code():
    """Every enum member has a catalog entry."""
    assert set(catalog.STATUS_CATALOG) == {int(code) for code in StatusCode}


def test_catalog_is_read_only():
    """The catalog mapping cannot be modified."""
    with pytest.raises(TypeError):
        catalog.STATUS_CATALOG[999] = catalog.describe(404)  # type: ignore[index]


def test_describe_known_code():
    """describe returns the metadata of a known code."""
    info = catalog.describe(404)
    assert info.code == 404
    assert info.phrase == "Not Found"
    assert info.helper == "not_found"
    assert info.category is StatusCategory.CLIENT_ERROR
    assert not info.vendor
    assert info.description


def test_describe_vendor_code():
    """Vendor codes are flagged as such."""
    info = catalog.describe(StatusCode.ELB_INCOMPATIBLE_PROTOCOL)
    assert info.helper == "http464"
    assert info.vendor
    assert info.category is StatusCategory.VENDOR


@pytest.mark.parametrize("code", [299, 999, None, "abc"])
def test_describe_unknown_code(code):
    """Unknown codes raise UnknownStatusError."""
    with pytest.raises(catalog.UnknownStatusError) as excinfo:
        catalog.describe(code)
    assert isinstance(excinfo.value, LookupError)
    assert excinfo.value.code == code


def test_codes_in_category():
    """codes_in lists the sorted codes of a category."""
    assert catalog.codes_in(StatusCategory.INFORMATIONAL) == [100, 101, 102]
    assert catalog.codes_in("vendor") == [460, 463, 464, 561]
    assert catalog.codes_in(StatusCategory.SERVER_ERROR) == [
        500, 501, 502, 503, 504, 505, 506, 507, 508, 510, 511,
    ]


def test_helper_names_are_unique():
    """No two catalog entries name the same helper."""
    names = [info.helper for info in catalog.STATUS_CATALOG.values()]
    assert len(names) == len(set(names))
