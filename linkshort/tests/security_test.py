import pytest

from linkshort.core.errors import Unauthorized
from linkshort.core.security import SecretVerifier


def test_verify_accepts_configured_secret():
    verifier = SecretVerifier("s3cret")
    assert verifier.verify("s3cret")


@pytest.mark.parametrize("candidate", ["", None, "S3cret", "s3cret ", "wrong"])
def test_verify_rejects_other_values(candidate):
    assert not SecretVerifier("s3cret").verify(candidate)


def test_plain_secret_is_not_stored():
    verifier = SecretVerifier("s3cret")
    assert "s3cret" not in vars(verifier).values()


def test_require_raises_unauthorized():
    with pytest.raises(Unauthorized):
        SecretVerifier("s3cret").require("nope")
