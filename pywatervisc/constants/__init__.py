from .constants import T_REF, RHO_REF, MU_REF, HI, HIJ, N_T_TERMS, N_RHO_TERMS, degF2R, LBCUFT2KGM3, PAS2CP
