import logging

from pywatervisc.classes import class_dic

logger = logging.getLogger(__name__)

def validate_methods(names, variables):
    variables = list(variables)
    for m, method in enumerate(names):
        if type(variables[m]) == str:
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                options = [e.name for e in class_dic[method]]
                logger.error("Incorrect %s specified: %r", method, variables[m])
                raise ValueError(f"Incorrect {method} specified: {variables[m]}. Choose from {options}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
