#
# rgbsync - Copyright (C) 2026 rgbsync developers
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#
import struct
from enum import Enum

import numpy as np


class ByteArgs:
    """
    Helper class for assembling fixed-size byte arrays from
    argument lists of varying types

    Unused trailing space stays zero.
    """
    def __init__(self, size):
        self._data_ptr = 0
        self._data = np.zeros(shape=(size,), dtype=np.uint8)


    def put(self, arg):
        """
        Add an argument to this array

        :param arg: The argument to append
        :type arg: int, Enum or tuple of ints

        :return: This ByteArgs instance
        :rtype: ByteArgs
        """
        if isinstance(arg, Enum):
            data = struct.pack("=B", arg.value)
        elif isinstance(arg, tuple):
            data = struct.pack("=%dB" % len(arg), *arg)
        else:
            data = struct.pack("=B", arg)

        datalen = len(data)
        if datalen > 0:
            if self._data_ptr + datalen > len(self._data):
                raise ValueError('No space left in argument list')

            self._data[self._data_ptr:self._data_ptr+datalen] = \
                    np.frombuffer(data, dtype=np.uint8)
            self._data_ptr += datalen

        return self


    def skip(self, count):
        """
        Leave the next count bytes zeroed

        :return: This ByteArgs instance
        :rtype: ByteArgs
        """
        if self._data_ptr + count > len(self._data):
            raise ValueError('No space left in argument list')
        self._data_ptr += count
        return self


    def __bytes__(self):
        return self._data.tobytes()
