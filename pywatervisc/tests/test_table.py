#!/usr/bin/env python3
"""
Validation tests for viscosity table generation and export.
"""

import sys
import os
import tempfile
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pywatervisc.viscosity as visc

def test_visc_table_columns():
    df = visc.visc_table([298.15, 373.15], [998.0, 1000.0])
    assert list(df.columns) == ["T (K)", "Density (kg/m3)", "Viscosity (Pa.s)",
                                "dVisc/dT (Pa.s/K)", "dVisc/dRho (Pa.s.m3/kg)"]
    assert len(df) == 2

def test_visc_table_values():
    df = visc.visc_table([298.15, 373.15], [998.0, 1000.0])
    assert np.isclose(df["Viscosity (Pa.s)"][0], visc.viscosity(298.15, 998.0), rtol=1e-14, atol=0)
    assert np.isclose(df["dVisc/dT (Pa.s/K)"][1], visc.dviscosity_dT(373.15, 1000.0), rtol=1e-14, atol=0)
    assert np.isclose(df["dVisc/dRho (Pa.s.m3/kg)"][1], visc.dviscosity_drho(373.15, 1000.0), rtol=1e-14, atol=0)

def test_visc_table_broadcast():
    """Single density against a temperature list"""
    df = visc.visc_table(np.linspace(300, 900, 4), 500)
    assert len(df) == 4
    assert (df["Density (kg/m3)"] == 500).all()

def test_visc_table_scalar():
    df = visc.visc_table(433.15, 1.0)
    assert len(df) == 1
    assert abs(df["Viscosity (Pa.s)"][0] * 1e6 - 14.538324) / 14.538324 < 1e-7

def test_visc_table_export():
    cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmpdir:
        os.chdir(tmpdir)
        try:
            visc.visc_table([300, 400, 500], 950, export=True)
            with open("WATER_VISC.txt") as f:
                text = f.read()
        finally:
            os.chdir(cwd)
    assert text.startswith("WATER_VISC\n")
    assert text.rstrip().endswith("/")
    assert "-- T (K)" in text
    assert len(text.strip().splitlines()) == 7  # Keyword, header, rule, 3 rows, terminator
