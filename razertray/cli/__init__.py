#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
