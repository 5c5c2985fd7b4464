from chain_seal.exceptions import (
    AlreadyBuiltError,
    ChainSealError,
    ConfigurationError,
    InvalidKeyError,
    NoRecipientsError,
    StateError,
    StorageWriteError,
    UnknownNetworkError,
)


def test_chain_seal_error_str_without_context() -> None:
    error = ChainSealError("Something failed")

    assert str(error) == "Something failed"


def test_chain_seal_error_str_with_context() -> None:
    error = ChainSealError("Failed", key="ab12", attempt=3)

    assert "Failed" in str(error)
    assert "key='ab12'" in str(error)
    assert "attempt=3" in str(error)


def test_storage_write_error_keeps_key() -> None:
    error = StorageWriteError("Write rejected", key="ab12")

    assert error.key == "ab12"
    assert str(error) == "Write rejected (key='ab12')"


def test_unknown_network_error_is_configuration_error() -> None:
    error = UnknownNetworkError("Unknown network: foo", network_name="foo")

    assert isinstance(error, ConfigurationError)
    assert error.network_name == "foo"


def test_invalid_key_error_is_configuration_error() -> None:
    assert issubclass(InvalidKeyError, ConfigurationError)


def test_state_errors_have_default_messages() -> None:
    assert str(AlreadyBuiltError()) == "already built or building"
    assert str(NoRecipientsError()) == "no recipients"
    assert isinstance(NoRecipientsError(), StateError)
