"""
Default error messages reported by the built-in rules.

Templates are resolved by the messages provider of the interpreter;
`{{ field }}` and the `meta` keys passed to `field.report` are the
placeholders available.
"""

messages = {
    "required": "The {{ field }} field must be defined",
    "string": "The {{ field }} field must be a string",
    "number": "The {{ field }} field must be a number",
    "boolean": "The value must be a boolean",
    "literal": "The {{ field }} field must be {{ expectedValue }}",
    "enum": "The selected {{ field }} is invalid",
    "date": "The {{ field }} field must be a datetime value",
    "date.format": "The {{ field }} field must be in one of the following formats: {{ formats }}",
    "object": "The {{ field }} field must be an object",
    "record": "The {{ field }} field must be an object",
    "array": "The {{ field }} field must be an array",
    "tuple": "The {{ field }} field must be an array",
    "union": "Invalid value provided for {{ field }} field",
    "unionGroup": "Invalid value provided for {{ field }} field",
    "minLength": "The {{ field }} field must have at least {{ min }} characters",
    "maxLength": "The {{ field }} field must not be greater than {{ max }} characters",
    "fixedLength": "The {{ field }} field must be {{ size }} characters long",
    "regex": "The {{ field }} field format is invalid",
    "min": "The {{ field }} field must be at least {{ min }}",
    "max": "The {{ field }} field must not be greater than {{ max }}",
    "range": "The {{ field }} field must be between {{ min }} and {{ max }}",
    "positive": "The {{ field }} field must be positive",
    "negative": "The {{ field }} field must be negative",
    "withoutDecimals": "The {{ field }} field must be an integer",
    "array.minLength": "The {{ field }} field must have at least {{ min }} items",
    "array.maxLength": "The {{ field }} field must not have more than {{ max }} items",
    "array.fixedLength": "The {{ field }} field must contain {{ size }} items",
    "notEmpty": "The {{ field }} field must not be empty",
    "distinct": "The {{ field }} field has duplicate values",
    "record.minLength": "The {{ field }} field must have at least {{ min }} items",
    "record.maxLength": "The {{ field }} field must not have more than {{ max }} items",
    "record.fixedLength": "The {{ field }} field must contain {{ size }} items",
}
