"""Perk modifier functions, their inputs and responses, and the registry that holds them."""