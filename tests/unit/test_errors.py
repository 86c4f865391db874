"""Error taxonomy — each error carries its HTTP status, message and details."""
from fred_proxy.core.errors import (
    ClientInputError,
    ConfigurationError,
    ProxyError,
    UpstreamServiceError,
    UpstreamTransportError,
)


def test_client_input_error_is_400():
    err = ClientInputError("Missing series_id parameter")
    assert err.status_code == 400
    assert err.message == "Missing series_id parameter"
    assert err.details is None


def test_configuration_error_is_generic_500():
    err = ConfigurationError()
    assert err.status_code == 500
    assert err.message == "Server configuration error"


def test_upstream_error_keeps_status_and_details():
    err = UpstreamServiceError("CPI", 404, "Not Found")
    assert err.status_code == 404
    assert err.message == "Failed to fetch data from FRED for series CPI"
    assert err.details == "Not Found"


def test_upstream_status_is_per_instance():
    assert UpstreamServiceError("CPI", 429).status_code == 429
    assert UpstreamServiceError.status_code == ProxyError.status_code == 500


def test_transport_error_is_500_with_message():
    err = UpstreamTransportError("Cannot connect to host")
    assert err.status_code == 500
    assert str(err) == err.message == "Cannot connect to host"
