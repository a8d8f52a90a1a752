"""fieldrules test suite.

- test_params.py: rule parameter coercion
- test_categories.py: value category dispatch
- test_comparisons.py: length/ordering predicates and required
- test_formats.py: format predicates
- test_registry.py: rule lookup and extension
- test_config.py: YAML registry configuration
- test_errors.py: fault hierarchy
"""
