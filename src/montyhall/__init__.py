"""Monte Carlo simulation of the Monty Hall problem."""
