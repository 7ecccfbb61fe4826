"""
pywatervisc
===================================

---------------------------------------------------------
IAPWS Viscosity of Water and its Partial Derivatives
---------------------------------------------------------

Closed-form evaluation of the IAPWS 2008 industrial formulation for the dynamic viscosity of
pure water (without the critical enhancement term), intended to be called from simulators that
need viscosity and its sensitivities at every evaluation point.

Note: Functions live in separate submodules, requiring seperate imports

Includes functions to;

- Calculate water viscosity from temperature (K) and density (kg/m3)
- Calculate analytic partial derivatives of viscosity with respect to temperature and density
- Calculate water viscosity in field units (deg F, lb/cuft, cP)
- Tabulate viscosity and derivatives, with optional text export


"""

import importlib
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

submodules = [
    'classes',
    'constants',
    'shared_fns',
    'validate',
    'viscosity'
]

__all__ = submodules

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pywatervisc.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pywatervisc' has no attribute '{name}'"
            )
