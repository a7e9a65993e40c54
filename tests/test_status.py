import pytest

from status_responses.status import StatusCategory
from status_responses.status import StatusCode
from status_responses.status import category_for


def test_status_codes_values():
    """Members carry their numeric status codes."""
    assert StatusCode.SUCCESS == 200
    assert StatusCode.NOT_FOUND == 404
    assert StatusCode.INTERNAL_SERVER_ERROR == 500
    assert StatusCode.IM_A_TEAPOT == 418
    assert StatusCode.ELB_UNAUTHORIZED == 561


def test_status_codes_are_unique():
    """No two members share a code."""
    values = [member.value for member in StatusCode]
    assert len(values) == len(set(values))
    assert len(values) == 62


@pytest.mark.parametrize(
    "code, expected",
    [
        (100, StatusCategory.INFORMATIONAL),
        (226, StatusCategory.SUCCESS),
        (308, StatusCategory.REDIRECTION),
        (451, StatusCategory.CLIENT_ERROR),
        (511, StatusCategory.SERVER_ERROR),
        (460, StatusCategory.VENDOR),
        (463, StatusCategory.VENDOR),
        (464, StatusCategory.VENDOR),
        (561, StatusCategory.VENDOR),
        (599, StatusCategory.SERVER_ERROR),
    ],
)
def test_category_for(code, expected):
    """Codes map to the category of their class."""
    assert category_for(code) is expected


@pytest.mark.parametrize("code", [0, 99, 600, -404])
def test_category_for_out_of_range(code):
    """Codes outside 100-599 have no category."""
    with pytest.raises(ValueError):
        category_for(code)
