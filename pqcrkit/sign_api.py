"""A uniform interface over signature algorithms and their parameter sets."""

from __future__ import annotations

from abc import ABC, abstractmethod

SIGN_ALGO_PARSES_PARAMSET_NAMES = 1 << 0


class SignatureError(Exception):
    """Raised when a signature cannot be produced or does not verify."""


class SignAlgo(ABC):
    """A signature algorithm addressed by name, with named parameter sets.

    Subclasses supply the sizes, the parameter set names, detached signing
    and the signature check; the attached ("SUPERCOP") form is built on top.
    """

    name: str = ""
    flags: int = 0

    @abstractmethod
    def publickey_bytes(self, paramset_name: str) -> int:
        """Size of a public key in bytes."""

    @abstractmethod
    def secretkey_bytes(self, paramset_name: str) -> int:
        """Size of a secret key in bytes."""

    @abstractmethod
    def signature_bytes_max(self, paramset_name: str) -> int:
        """Largest size of a signature in bytes."""

    def signature_bytes_min(self, paramset_name: str) -> int:
        """Smallest size of a signature in bytes; fixed-size by default."""
        return self.signature_bytes_max(paramset_name)

    @abstractmethod
    def paramset_names(self) -> list[str]:
        """Names of the parameter sets this algorithm offers."""

    @abstractmethod
    def detached_sign(self, paramset_name: str, message: bytes, secretkey: bytes) -> bytes:
        """Return a signature of message, kept apart from it."""

    @abstractmethod
    def _check_signature(
        self, paramset_name: str, signature: bytes, message: bytes, publickey: bytes
    ) -> bool:
        """Whether signature is valid for message under publickey."""

    def detached_verify(
        self, paramset_name: str, signature: bytes, message: bytes, publickey: bytes
    ) -> None:
        """Check a detached signature; raises SignatureError if it is not valid."""
        low = self.signature_bytes_min(paramset_name)
        high = self.signature_bytes_max(paramset_name)
        if not low <= len(signature) <= high:
            raise SignatureError(
                f"signature length {len(signature)} outside {low}..{high}"
            )
        if not self._check_signature(
            paramset_name, bytes(signature), bytes(message), bytes(publickey)
        ):
            raise SignatureError("signature does not verify")

    def supercop_sign(self, paramset_name: str, message: bytes, secretkey: bytes) -> bytes:
        """Return the signature followed by the message."""
        expected = self.signature_bytes_max(paramset_name)
        signature = self.detached_sign(paramset_name, bytes(message), secretkey)
        if len(signature) != expected:
            raise SignatureError(
                f"signature is {len(signature)} bytes, expected {expected}"
            )
        return bytes(signature) + bytes(message)

    def supercop_sign_open(
        self, paramset_name: str, signed_message: bytes, publickey: bytes
    ) -> bytes:
        """Verify a signed message and return the message it carries."""
        sig_bytes = self.signature_bytes_max(paramset_name)
        signed_message = bytes(signed_message)
        if len(signed_message) < sig_bytes:
            raise SignatureError(
                f"signed message is {len(signed_message)} bytes, "
                f"shorter than a {sig_bytes}-byte signature"
            )
        signature = signed_message[:sig_bytes]
        message = signed_message[sig_bytes:]
        self.detached_verify(paramset_name, signature, message, publickey)
        return message


_REGISTRY: dict[str, SignAlgo] = {}


def register_sign_algo(algo: SignAlgo) -> SignAlgo:
    """Make algo available by its name; raises ValueError on a clash."""
    if not algo.name:
        raise ValueError("a signature algorithm needs a name")
    if algo.name in _REGISTRY:
        raise ValueError(f"signature algorithm already registered: {algo.name!r}")
    _REGISTRY[algo.name] = algo
    return algo


def get_sign_algo(name: str) -> SignAlgo:
    """Return the registered algorithm with this name; raises KeyError if none."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"unknown signature algorithm: {name!r}") from None


def sign_algo_names() -> list[str]:
    """Names of registered algorithms, in registration order."""
    return list(_REGISTRY)