from .prove import Prover, ask, answer

__all__ = ["Prover", "ask", "answer"]
