"""Sparse matrices in compressed row form, their addition and its comparison."""