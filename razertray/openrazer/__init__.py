#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
from .capabilities import DeviceCapabilities
from .device import Device
from .errors import DecodeError, IntrospectionParseError, OpenRazerError, \
        ProtocolError, TransportError
from .manager import Manager
from .proxy import ROOT_PATH, SERVICE
from .types import Dpi, Feature, LedId, MatrixDimensions, Rgb
