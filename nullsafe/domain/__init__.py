"""
Domain layer module.

Key components:
- exceptions.py: Error taxonomy (absent values vs. absent callables)
- functions.py: Callable type aliases
- validation.py: Guards applied to every combinator argument
- optional.py: Single-value container
- optional_array.py: Sequence container
"""
