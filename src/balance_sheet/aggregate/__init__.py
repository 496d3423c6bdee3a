"""Month-grid aggregation and balance merging.

`months` folds one series of dated amounts onto a 12-slot grid anchored on
the start of its year; `merge` joins an expense grid and a revenue grid into
signed monthly balances.
"""
