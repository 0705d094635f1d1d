"""Left-to-right word reduction.

There is no precedence and no nesting: operators apply in the order they are
read, and the left operand is whatever words have accumulated since the last
completed step.
"""
