"""
IAPWS 2008 viscosity of pure water and its partial derivatives.

Provides viscosity(T, rho), dviscosity_dT(T, rho), dviscosity_drho(T, rho) in SI units
(T in K, rho in kg/m3, viscosity in Pa.s), plus field unit and table helpers.
"""

from .viscosity import viscosity, dviscosity_dT, dviscosity_drho, dviscosity, WaterViscosityIAPWS, visw_iapws, visc_table
from .iapws_series import reduce_inputs, mu0_factor, dmu0_factor_dbarT, mu0, dmu0_dbarT, t_series, rho_series, mu1_factor, dmu1_factor_dbarT, dmu1_factor_dbar_rho
