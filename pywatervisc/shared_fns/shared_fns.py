#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyWaterVisc - IAPWS Viscosity of Water and its Derivatives
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

import numpy as np
import numpy.typing as npt
from typing import Union, List

def convert_to_numpy(input_data: Union[float, List[float], npt.ArrayLike]) -> np.ndarray:
    # Float array view of scalar, list, tuple or array input. Scalars stay 0-d
    return np.asarray(input_data, dtype=float)

def process_input(input_data):
    # Only 0-d results become floats. Size-1 arrays are kept, so array inputs always give array outputs
    # Check if input_data is a numpy array
    if isinstance(input_data, np.ndarray):
        if input_data.ndim == 0:
            # Return a plain float for scalar results
            return float(input_data)
        else:
            # Return the array itself if it's larger
            return input_data
    elif isinstance(input_data, np.floating):
        return float(input_data)
    else:
        # If it's a single value (not in a list or array), return it directly
        return input_data
