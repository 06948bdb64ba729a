import pytest

from sharutils.validators import validate_version_mode


@pytest.mark.parametrize(
    "valid", ["v", "version", "VERS", "c", "copyright", "Copy", "n", "notice", " n "]
)
def test_version_mode_accepts_prefixes(valid):
    validate_version_mode(valid)


@pytest.mark.parametrize("invalid", ["", "x", "verbose", "copyleft", "nope"])
def test_version_mode_rejects_invalid(invalid):
    with pytest.raises(ValueError, match="invalid version mode"):
        validate_version_mode(invalid)
