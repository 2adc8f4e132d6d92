"""Presentation layer - How fetch outcomes reach the consumer.

Structure:
- reactive/: Rx and Future adapters over the fetch coroutine
- demo.py: The demo flow printing every variant's outcome

The presentation layer depends on the domain protocols but contains no
fetching or decoding logic.
"""
