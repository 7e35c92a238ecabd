"""Services module.

This module provides the service layer architecture:
- exceptions: Custom service exceptions
- orders: Order management and the monthly order identifier sequence
- companies: Company customers and their employee orders
- labour: Workforce roster
- wages: Piece-rate configuration and wage calculation
- work: Work assignments for workers on orders
"""
