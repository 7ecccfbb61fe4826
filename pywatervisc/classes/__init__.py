from .classes import visc_var, class_dic
