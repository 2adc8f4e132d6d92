"""Test suite for the reactive completion demo.

Test structure:
- unit/: Unit tests - Domain, decoding and adapters in isolation
- integration/: Integration tests - httpx client and demo against mocked HTTP
"""
