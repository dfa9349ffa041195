"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 1440

DEFAULT_CHECK_IN_TARGET = "08:00"
DEFAULT_CHECK_OUT_TARGET = "17:00"

# Free-text values of the "Tipe Absensi" column written by the clock device.
CHECK_IN_PUNCH_LABEL = "Absensi Masuk"
CHECK_OUT_PUNCH_LABEL = "Absensi Pulang"

DEFAULT_PUNCH_WORKSHEET = "attendance_import"
DEFAULT_RECAP_GROUP_BY = "name"
