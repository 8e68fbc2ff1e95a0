"""FnFun — functional-programming features demonstrated through runnable examples.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
