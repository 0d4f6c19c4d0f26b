import warnings

import pytest

from catering.api.error import ClientError, ServerError, raise_for_error
from catering.domain.errors import (
    MAILER_FAULT,
    app_error,
    invalid_param,
    not_found,
    required_param,
    store_fault,
    unauthorized,
)


@pytest.mark.parametrize(
    "error,status_code",
    [
        (required_param(), 400),
        (unauthorized(), 401),
        (not_found(), 404),
        (invalid_param(), 422),
    ],
)
def test_client_errors_map_to_status(error, status_code):
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        with pytest.raises(ClientError) as exc_info:
            raise_for_error(error)

    assert exc_info.value.status_code == status_code
    assert exc_info.value.base_error is error


@pytest.mark.parametrize("error", [store_fault(), app_error(MAILER_FAULT)])
def test_other_errors_are_server_errors(error):
    with pytest.raises(ServerError):
        raise_for_error(error)
