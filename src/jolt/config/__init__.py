# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework

"""
Configuration for the Jolt framework.
"""

from jolt.config.services import ServiceSettings

__all__ = ["ServiceSettings"]
