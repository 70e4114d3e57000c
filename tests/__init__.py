"""
InstaPay Test Suite

This package contains all tests for the InstaPay payment method including:
- Unit tests for settings parsing and validation
- Transaction id encoding and decoding
- Payment method contract and behaviour tests
- HTTP sandbox host tests
"""
