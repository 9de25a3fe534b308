"""amcore: an extensible interpreter core

A rule-based command dispatcher (Language) paired with a self-expanding
doubly-infinite tape (Substrate), composed by an AbstractMachine that
delegates unmatched commands to registered sub-interpreters (Resources).

Responsibilities:
    - Open, run-time extensible grammar registration and first-match dispatch
    - Tape memory with head motion, amortized growth and compaction
    - Resource composition and qualified command delegation
    - A state registry resource with accept set and history stack

Cross-cutting Concerns:
    Error Handling:
        - Structural violations raise AMError subclasses
        - Grammar mismatch is data (EMPTY), never an exception
        - AbstractMachine.run reports library errors as Diagnostic results

    Logging:
        - Standard library logging, one logger per module
        - No handlers installed by the library

    Threading:
        - Single-threaded; callers serialize concurrent access themselves
"""

__version__ = "0.1.0"
