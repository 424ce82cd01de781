#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
class LocalizationError(Exception):
    pass


class ScheduleDecodeError(Exception):
    """Raised when a wire-format schedule record is rejected by the codec."""
