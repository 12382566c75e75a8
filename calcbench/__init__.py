"""calcbench — test-lifecycle walkthrough around a four-function calculator.

A shared Calculator is set up once, each test runs between before/after hooks,
one test expects DivisionError and two are skipped. The suite runs either
in-process through calcbench's own runner or as a plain pytest module.

Usage:
    python -m calcbench list                 # Show suites
    python -m calcbench run calculator       # Run in-process, report outcomes
    python -m calcbench judge calculator     # Run the pytest rendition
"""
