"""Built-in validation message templates."""

from typing import Dict, Union

DEFAULT_MESSAGES: Dict[str, Union[str, Dict[str, str]]] = {
    "required": "The :attribute field is required.",
    "filled": "The :attribute field must have a value.",
    "string": "The :attribute must be a string.",
    "integer": "The :attribute must be an integer.",
    "numeric": "The :attribute must be a number.",
    "boolean": "The :attribute field must be true or false.",
    "array": "The :attribute must be an array.",
    "email": "The :attribute must be a valid email address.",
    "url": "The :attribute format is invalid.",
    "alpha": "The :attribute may only contain letters.",
    "alpha_num": "The :attribute may only contain letters and numbers.",
    "alpha_dash": "The :attribute may only contain letters, numbers, dashes and underscores.",
    "digits": "The :attribute must be :digits digits.",
    "in": "The selected :attribute is invalid.",
    "not_in": "The selected :attribute is invalid.",
    "regex": "The :attribute format is invalid.",
    "confirmed": "The :attribute confirmation does not match.",
    "same": "The :attribute and :other must match.",
    "different": "The :attribute and :other must be different.",
    "date": "The :attribute is not a valid date.",
    "unique": "The :attribute has already been taken.",
    "exists": "The selected :attribute is invalid.",
    "min": {
        "numeric": "The :attribute must be at least :min.",
        "string": "The :attribute must be at least :min characters.",
        "array": "The :attribute must have at least :min items.",
    },
    "max": {
        "numeric": "The :attribute may not be greater than :max.",
        "string": "The :attribute may not be greater than :max characters.",
        "array": "The :attribute may not have more than :max items.",
    },
    "between": {
        "numeric": "The :attribute must be between :min and :max.",
        "string": "The :attribute must be between :min and :max characters.",
        "array": "The :attribute must have between :min and :max items.",
    },
    "size": {
        "numeric": "The :attribute must be :size.",
        "string": "The :attribute must be :size characters.",
        "array": "The :attribute must contain :size items.",
    },
}

FALLBACK_MESSAGE = "The :attribute is invalid."
