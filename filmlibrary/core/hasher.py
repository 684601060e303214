import hashlib


class Hasher:
    """Salted, deterministic digest used for password storage and session keys.

    The result is the hex encoding of the salt bytes followed by the MD5
    digest of the message. It is not meant to be cryptographically strong.
    """

    def __init__(self, salt: bytes):
        self.salt = salt

    def get_hash(self, message: str) -> str:
        digest = hashlib.md5(message.encode("utf-8")).digest()
        return (self.salt + digest).hex()
