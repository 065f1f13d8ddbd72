"""
handlers/ - Presentation Layer
================================
Menu command handlers. Each handler prompts the operator for its inputs,
delegates to the appropriate Service, and prints the outcome.
No business logic lives here.
"""
