"""A registry mapping keys to creator callables."""

from __future__ import annotations

from typing import Any, Callable, Hashable


class Factory:
    """Creates products by key from registered creator callables."""

    def __init__(self, name: str = "Factory"):
        self.name = name
        self._register: dict[Hashable, Callable[..., Any]] = {}

    def register_product(self, key, creator, replace_if_found=False) -> bool:
        """Register creator under key; return False if key exists and is not replaced."""
        if not callable(creator):
            raise TypeError("creator must be callable")
        if key in self._register and not replace_if_found:
            return False
        self._register[key] = creator
        return True

    def create(self, key, *args, **kwargs):
        """Build the product registered under key with the given arguments."""
        if not self._register:
            raise LookupError(
                f"[{self.name}] Error!\n"
                "        There are no products registered in the factory.\n"
                "        Did you forget to call 'register_product'?\n"
            )
        try:
            creator = self._register[key]
        except KeyError:
            raise LookupError(
                f"[{self.name}] Error!\n"
                f"        The key '{key}' is not associated to any registered product.\n"
                f"        The list of registered product is: {self._registered_products()}\n"
                "        Did you forget to register it?\n"
            ) from None
        return creator(*args, **kwargs)

    def has_product(self, key) -> bool:
        return key in self._register

    def register_size(self) -> int:
        return len(self._register)

    def clean_up(self) -> None:
        """Forget every registered product."""
        self._register.clear()

    def _registered_products(self) -> str:
        keys = list(self._register)
        try:
            keys = sorted(keys)
        except TypeError:
            pass
        return ", ".join(str(k) for k in keys)