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

import logging

import numpy as np
import numpy.typing as npt
from typing import Union, List

import pandas as pd
from tabulate import tabulate

from pywatervisc.classes import visc_var
from pywatervisc.constants import T_REF, RHO_REF, MU_REF, degF2R, LBCUFT2KGM3, PAS2CP
from pywatervisc.shared_fns import convert_to_numpy, process_input
from pywatervisc.validate import validate_methods
from pywatervisc.viscosity.iapws_series import (
    reduce_inputs, mu0, dmu0_dbarT, t_series, rho_series,
    mu1_factor, dmu1_factor_dbarT, dmu1_factor_dbar_rho,
)

logger = logging.getLogger(__name__)

ArrayIn = Union[float, List[float], npt.ArrayLike]

# Out-of-domain inputs (T <= 0) propagate as NaN / Inf without warnings
_quiet = dict(divide="ignore", invalid="ignore", over="ignore")


def viscosity(T: ArrayIn, rho: ArrayIn) -> Union[float, np.ndarray]:
    """ Returns dynamic viscosity of water (Pa.s) from the IAPWS 2008 formulation,
        without the critical enhancement term

        T: Temperature (deg K). Must be > 0, results for T <= 0 are NaN or Inf
        rho: Density (kg/m3)

        Scalars return a float, lists and arrays are broadcast and return an array
    """
    T, rho = convert_to_numpy(T), convert_to_numpy(rho)
    with np.errstate(**_quiet):
        barT, bar_rho = reduce_inputs(T, rho)
        mu1 = np.exp(bar_rho * mu1_factor(t_series(barT), rho_series(bar_rho)))
        return process_input(mu0(barT) * mu1 * MU_REF)


def dviscosity_dT(T: ArrayIn, rho: ArrayIn) -> Union[float, np.ndarray]:
    """ Returns partial derivative of water viscosity with respect to temperature at constant density (Pa.s/K)

        T: Temperature (deg K)
        rho: Density (kg/m3)
    """
    T, rho = convert_to_numpy(T), convert_to_numpy(rho)
    with np.errstate(**_quiet):
        barT, bar_rho = reduce_inputs(T, rho)
        t_terms, rho_terms = t_series(barT), rho_series(bar_rho)
        mu1 = np.exp(bar_rho * mu1_factor(t_terms, rho_terms))
        dmu1_dbarT = bar_rho * mu1 * dmu1_factor_dbarT(barT, t_terms, rho_terms)
        dmu_dbarT = dmu0_dbarT(barT) * mu1 + dmu1_dbarT * mu0(barT)
        return process_input(MU_REF * dmu_dbarT / T_REF)


def dviscosity_drho(T: ArrayIn, rho: ArrayIn) -> Union[float, np.ndarray]:
    """ Returns partial derivative of water viscosity with respect to density at constant temperature (Pa.s.m3/kg)

        T: Temperature (deg K)
        rho: Density (kg/m3)
    """
    T, rho = convert_to_numpy(T), convert_to_numpy(rho)
    with np.errstate(**_quiet):
        barT, bar_rho = reduce_inputs(T, rho)
        t_terms, rho_terms = t_series(barT), rho_series(bar_rho)
        factor = mu1_factor(t_terms, rho_terms)
        dmu_dbar_rho = mu0(barT) * np.exp(bar_rho * factor) * (
            factor + bar_rho * dmu1_factor_dbar_rho(t_terms, rho_terms)
        )
        return process_input(MU_REF * dmu_dbar_rho / RHO_REF)


def dviscosity(T: ArrayIn, rho: ArrayIn, var: Union[str, visc_var]) -> Union[float, np.ndarray]:
    """ Returns partial derivative of water viscosity with respect to the chosen variable

        T: Temperature (deg K)
        rho: Density (kg/m3)
        var: A string or visc_var Enum class that specifies the derivative variable;
                   T: Temperature, at constant density (Pa.s/K)
                   RHO: Density, at constant temperature (Pa.s.m3/kg)
    """
    var = validate_methods(["viscvar"], [var])
    if not isinstance(var, visc_var):
        raise ValueError(f"var must be a visc_var or one of {[v.name for v in visc_var]}, got {var!r}")
    if var == visc_var.T:
        return dviscosity_dT(T, rho)
    return dviscosity_drho(T, rho)


class WaterViscosityIAPWS:
    """ IAPWS 2008 water viscosity as a property object, for hosts that
        evaluate value and derivatives through a common interface.
        Holds no state, so one instance can be shared between callers
    """
    name = "IAPWS"

    def value(self, T: ArrayIn, rho: ArrayIn):
        return viscosity(T, rho)

    def dvalue_dT(self, T: ArrayIn, rho: ArrayIn):
        return dviscosity_dT(T, rho)

    def dvalue_drho(self, T: ArrayIn, rho: ArrayIn):
        return dviscosity_drho(T, rho)

    def dvalue(self, T: ArrayIn, rho: ArrayIn, var: Union[str, visc_var]):
        return dviscosity(T, rho, var)

    def __repr__(self):
        return f"{self.__class__.__name__}()"


def visw_iapws(degf: ArrayIn, den: ArrayIn) -> Union[float, np.ndarray]:
    """ Returns pure water viscosity (cP) from the IAPWS 2008 formulation in field units

        degf: Temperature (deg F)
        den: Water density (lb/cuft)
    """
    degk = (convert_to_numpy(degf) + degF2R) / 1.8
    rho = convert_to_numpy(den) * LBCUFT2KGM3
    return process_input(convert_to_numpy(viscosity(degk, rho)) * PAS2CP)


def visc_table(degk: ArrayIn, rho: ArrayIn, export: bool = False) -> pd.DataFrame:
    """ Returns a DataFrame of water viscosity and its partial derivatives
        degk: Temperature(s) (deg K)
        rho: Density(ies) (kg/m3). Broadcast against degk
        export: Boolean flag that controls whether the table is also written to WATER_VISC.txt. Default is False
    """
    degk, rho = np.broadcast_arrays(np.atleast_1d(convert_to_numpy(degk)), np.atleast_1d(convert_to_numpy(rho)))
    df = pd.DataFrame()
    df["T (K)"] = degk.ravel()
    df["Density (kg/m3)"] = rho.ravel()
    df["Viscosity (Pa.s)"] = convert_to_numpy(viscosity(df["T (K)"], df["Density (kg/m3)"]))
    df["dVisc/dT (Pa.s/K)"] = convert_to_numpy(dviscosity_dT(df["T (K)"], df["Density (kg/m3)"]))
    df["dVisc/dRho (Pa.s.m3/kg)"] = convert_to_numpy(dviscosity_drho(df["T (K)"], df["Density (kg/m3)"]))

    if export:
        table = df.set_index("T (K)")
        headers = ["-- T (K)"] + list(table.columns)
        fileout = "WATER_VISC\n" + tabulate(table, headers, floatfmt=".6e") + "\n/"
        with open("WATER_VISC.txt", "w") as text_file:
            text_file.write(fileout)
        logger.info("Wrote %d rows to WATER_VISC.txt", len(df))
    return df
