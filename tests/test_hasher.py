import hashlib

from filmlibrary.core.hasher import Hasher


def test_hash_is_deterministic():
    h = Hasher(b"secret")
    assert h.get_hash("password") == h.get_hash("password")


def test_hash_is_salt_followed_by_md5():
    h = Hasher(b"session")
    expected = b"session".hex() + hashlib.md5(b"bob").hexdigest()
    assert h.get_hash("bob") == expected


def test_salt_changes_digest():
    assert Hasher(b"secret").get_hash("bob") != Hasher(b"session").get_hash("bob")


def test_different_messages_differ():
    h = Hasher(b"secret")
    assert h.get_hash("alice") != h.get_hash("bob")
