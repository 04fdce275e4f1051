#
# Copyright (C) 2026 rgbsync developers — LGPL-3.0-or-later
#
