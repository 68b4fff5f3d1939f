"""Mixin giving objects lazily built bindings from one of their attributes."""

from typing import Optional

from ..bindings import BindingStore

DEFAULT_FIELD_STORAGE = "fields"


class HasBindings:
    """
    Expose ``bindings()`` built from the attribute named by ``field_storage``.

    The attribute may hold an identifier list, a three-part document or a
    BindingStore. The store is built on first access and cached.
    """

    field_storage: Optional[str] = None
    _bindings_cache: Optional[BindingStore] = None

    def bindings(self) -> BindingStore:
        if self._bindings_cache is None:
            self._bindings_cache = BindingStore.init(
                getattr(self, self.get_field_storage_key(), None)
            )
        return self._bindings_cache

    def get_field_storage_key(self) -> str:
        return self.field_storage or DEFAULT_FIELD_STORAGE
