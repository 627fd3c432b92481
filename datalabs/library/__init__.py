"""Literature catalogue with a key table, sorting and sorting comparisons."""