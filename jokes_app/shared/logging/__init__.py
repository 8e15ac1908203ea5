# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .logger import clear_correlation_id, logger, set_correlation_id, setup_logging

__all__ = ["clear_correlation_id", "logger", "set_correlation_id", "setup_logging"]
