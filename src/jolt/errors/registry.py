# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""Unified error registry implementation for the Jolt framework."""

from __future__ import annotations

import threading
from typing import Any


class ErrorRegistry:
    """Singleton registry for all error codes and categories in the Jolt framework."""

    _instance: ErrorRegistry | None = None
    _lock = threading.RLock()

    def __new__(cls) -> ErrorRegistry:
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def __init__(self) -> None:
        """Initialize registry attributes if not already present."""
        if not hasattr(self, "_categories"):
            self._categories: dict[str, Any] = {}
        if not hasattr(self, "_codes"):
            self._codes: dict[str, Any] = {}

    def register_category(self, name: str, parent: Any = None) -> Any:
        """Register a category in the registry.

        Args:
            name: The category name
            parent: Optional parent category

        Returns:
            The registered ErrorCategory
        """
        with self._lock:
            if name in self._categories:
                return self._categories[name]

            from jolt.errors.base import ErrorCategory

            category = ErrorCategory(name, parent)
            self._categories[name] = category
            return category

    def register_code(self, code: str, category_name: str) -> Any:
        """Register a code in the registry.

        Args:
            code: The error code
            category_name: The category name

        Returns:
            The registered ErrorCode
        """
        with self._lock:
            key = f"{category_name}.{code}"
            if key in self._codes:
                return self._codes[key]

            category = self.get_category(category_name)

            from jolt.errors.base import ErrorCode

            error_code = ErrorCode(code, category)
            self._codes[key] = error_code
            self._codes[code] = error_code
            return error_code

    def get_category(self, name: str, parent: Any = None) -> Any:
        """Get or create a category."""
        with self._lock:
            if name in self._categories:
                return self._categories[name]
            return self.register_category(name, parent)

    def get_code(self, code: str, category_name: str = "INTERNAL") -> Any:
        """Get or create an error code.

        Args:
            code: The error code
            category_name: The category name (defaults to INTERNAL)

        Returns:
            The ErrorCode
        """
        with self._lock:
            key = f"{category_name}.{code}"
            if key in self._codes:
                return self._codes[key]
            return self.register_code(code, category_name)

    def lookup_code(self, code: str) -> Any:
        """Look up an error code without creating it if missing."""
        with self._lock:
            return self._codes.get(code)

    def lookup_category(self, name: str) -> Any:
        """Look up a category without creating it if missing."""
        with self._lock:
            return self._categories.get(name)

    def get_all_codes(self) -> list[Any]:
        """Return every registered error code, once each."""
        with self._lock:
            unique: dict[int, Any] = {id(code): code for code in self._codes.values()}
            return list(unique.values())

    def get_all_categories(self) -> list[Any]:
        """Return every registered error category."""
        with self._lock:
            return list(self._categories.values())


registry = ErrorRegistry()
