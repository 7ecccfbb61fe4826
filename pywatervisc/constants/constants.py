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

# Reference constants, IAPWS 2008 viscosity formulation
T_REF = 647.096  # Reference (critical) temperature, K
RHO_REF = 322.0  # Reference (critical) density, kg/m³
MU_REF = 1.0e-6  # Reference viscosity, Pa·s

# Dilute-gas coefficients, Hi (i = 0..3)
HI = np.array([1.67752, 2.20462, 0.6366564, -0.241605])
HI.setflags(write=False)

# Dense-fluid coefficients, Hij (i = 0..5, j = 0..6). Zeros are part of the table
HIJ = np.array([
    [0.520094, 0.222531, -0.281378, 0.161913, -0.0325372, 0.0, 0.0],
    [0.0850895, 0.999115, -0.906851, 0.257399, 0.0, 0.0, 0.0],
    [-1.08374, 1.88797, -0.772479, 0.0, 0.0, 0.0, 0.0],
    [-0.289555, 1.26613, -0.489837, 0.0, 0.0698452, 0.0, -0.00435673],
    [0.0, 0.0, -0.25704, 0.0, 0.0, 0.00872102, 0.0],
    [0.0, 0.120573, 0.0, 0.0, 0.0, 0.0, -0.000593264],
])
HIJ.setflags(write=False)

N_T_TERMS, N_RHO_TERMS = HIJ.shape

# Unit conversions
degF2R = 459.67  # Offset to convert degrees F to degrees Rankine
LBCUFT2KGM3 = 16.01846337  # lb/cuft to kg/m³
PAS2CP = 1000.0  # Pa·s to cP
