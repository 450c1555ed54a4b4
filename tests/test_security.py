# tests/test_security.py
from app.core.security import hash_password, verify_password


def test_hash_differs_from_plaintext():
    hashed = hash_password("s3cret-pass")
    assert hashed != "s3cret-pass"
    assert verify_password("s3cret-pass", hashed)


def test_wrong_password_does_not_verify():
    hashed = hash_password("s3cret-pass")
    assert not verify_password("other-pass", hashed)


def test_same_password_hashes_differently():
    assert hash_password("s3cret-pass") != hash_password("s3cret-pass")


def test_garbage_hash_does_not_verify():
    assert not verify_password("s3cret-pass", "not-a-bcrypt-hash")
