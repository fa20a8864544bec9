"""Clock relations, difference bound matrices and their text renderings."""