# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework

"""
Jolt: service activation for the Jolt UI framework.
"""

from jolt.di import (
    ActivatorUtilities,
    ServiceCollection,
    ServiceLifetime,
    ServiceProvider,
    use_startup,
)

__version__ = "0.1.0"

__all__ = [
    "ActivatorUtilities",
    "ServiceCollection",
    "ServiceLifetime",
    "ServiceProvider",
    "use_startup",
]
