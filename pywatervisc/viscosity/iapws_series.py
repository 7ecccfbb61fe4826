"""
IAPWS 2008 viscosity of water: series building blocks.

Provides the reduced-variable transformation and the two series of the
correlation, together with their closed-form derivatives:
    - reduce_inputs(T, rho): reduced temperature and density
    - mu0_factor / dmu0_factor_dbarT: dilute-gas denominator sum(Hi / barT^i)
    - mu0 / dmu0_dbarT: dilute-gas viscosity 100 * sqrt(barT) / mu0_factor
    - t_series / rho_series: powers of (1/barT - 1) and (bar_rho - 1)
    - mu1_factor / dmu1_factor_dbarT / dmu1_factor_dbar_rho: dense-fluid exponent

Functions accept numpy scalars or arrays and broadcast element-wise. They do
not validate inputs; callers that need NaN/Inf propagation without warnings
should evaluate inside numpy.errstate (the public viscosity functions do).

Reference:
    Huber, M.L. et al. (2009). "New International Formulation for the
    Viscosity of H2O." J. Phys. Chem. Ref. Data, 38(2), 101-125.

Units: T in K, rho in kg/m3. Everything else here is dimensionless.
"""

import numpy as np

from pywatervisc.constants import T_REF, RHO_REF, HI, HIJ, N_T_TERMS, N_RHO_TERMS


def reduce_inputs(T, rho):
    """
    Reduced temperature and density.

    Parameters:
        T: temperature in K
        rho: density in kg/m3

    Returns:
        (barT, bar_rho)
    """
    return T / T_REF, rho / RHO_REF


def mu0_factor(barT):
    """ sum_{i=0..3} Hi[i] / barT^i """
    sum_val = 0.0
    barT_i = 1.0
    for h in HI:
        sum_val = sum_val + h / barT_i
        barT_i = barT_i * barT
    return sum_val


def dmu0_factor_dbarT(barT):
    """ -sum_{i=1..3} i * Hi[i] / barT^(i+1) """
    dsum_val = 0.0
    barT_i = barT * barT
    for i in range(1, len(HI)):
        dsum_val = dsum_val - i * HI[i] / barT_i
        barT_i = barT_i * barT
    return dsum_val


def mu0(barT):
    """ Reduced dilute-gas viscosity """
    return 100.0 * np.sqrt(barT) / mu0_factor(barT)


def dmu0_dbarT(barT):
    """ Derivative of the reduced dilute-gas viscosity (quotient rule) """
    factor = mu0_factor(barT)
    sqrt_barT = np.sqrt(barT)
    return (50.0 / (factor * sqrt_barT)
            - 100.0 * sqrt_barT * dmu0_factor_dbarT(barT) / (factor * factor))


def t_series(barT):
    """ [1, x, x^2, ..., x^5] with x = 1/barT - 1 """
    fac = 1.0 / barT - 1.0
    series = [1.0]
    for i in range(1, N_T_TERMS):
        series.append(series[i - 1] * fac)
    return series


def rho_series(bar_rho):
    """ [1, y, y^2, ..., y^6] with y = bar_rho - 1 """
    fac = bar_rho - 1.0
    series = [1.0]
    for j in range(1, N_RHO_TERMS):
        series.append(series[j - 1] * fac)
    return series


def _row_sum(i, rho_terms):
    # sum_j Hij[i][j] * rho_terms[j]
    sum_val = 0.0
    for j in range(N_RHO_TERMS):
        sum_val = sum_val + HIJ[i, j] * rho_terms[j]
    return sum_val


def mu1_factor(t_terms, rho_terms):
    """
    Dense-fluid exponent factor.

    sum_i t_terms[i] * sum_j Hij[i][j] * rho_terms[j], so that
    mu1 = exp(bar_rho * mu1_factor)
    """
    sum_val = 0.0
    for i in range(N_T_TERMS):
        sum_val = sum_val + t_terms[i] * _row_sum(i, rho_terms)
    return sum_val


def dmu1_factor_dbarT(barT, t_terms, rho_terms):
    """
    Partial derivative of mu1_factor with respect to barT.

    d(x^i)/dbarT = -i * x^(i-1) / barT^2, hence the t_terms[i - 1] index.
    """
    dsum_val = 0.0
    barT2 = barT * barT
    for i in range(1, N_T_TERMS):
        dsum_val = dsum_val - i * t_terms[i - 1] * _row_sum(i, rho_terms) / barT2
    return dsum_val


def dmu1_factor_dbar_rho(t_terms, rho_terms):
    """ Partial derivative of mu1_factor with respect to bar_rho """
    dsum_val = 0.0
    for i in range(N_T_TERMS):
        dsum_val_j = 0.0
        for j in range(1, N_RHO_TERMS):
            dsum_val_j = dsum_val_j + j * HIJ[i, j] * rho_terms[j - 1]
        dsum_val = dsum_val + t_terms[i] * dsum_val_j
    return dsum_val
