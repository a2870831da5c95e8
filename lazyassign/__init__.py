# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    LazyAssignError,
    OwnershipError,
    SubscriptionError,
    ValidationError,
)
from .accessor import Accessor
from .binder import MAX_TARGETS, Target, assign_lazy, assign_lazy2, assign_lazy3, bind
from .config import BinderSettings, settings
from .contracts import Cancellable, Publisher, open_subscription
from .handle import Handle
from .ownership import Ownership
from .version import __version__

logger = logging.getLogger(__name__)

__all__ = (
    "__version__",
    "MAX_TARGETS",
    "Accessor",
    "BinderSettings",
    "Cancellable",
    "Handle",
    "LazyAssignError",
    "Ownership",
    "OwnershipError",
    "Publisher",
    "SubscriptionError",
    "Target",
    "ValidationError",
    "assign_lazy",
    "assign_lazy2",
    "assign_lazy3",
    "bind",
    "logger",
    "open_subscription",
    "settings",
)
