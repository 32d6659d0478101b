"""
handlers/ - Presentation Layer
================================
Interactive menu handlers. Each handler prompts for its fields on the
console, delegates to BankService, and prints the response.
No business logic lives here.
"""
