"""
Carbon Mail: inbox cleanup assistant backed by a local language model.

Sends emails to a locally running Ollama service for a DELETE / KEEP / REVIEW
decision, with:
- Strict, never-failing parsing of model output
- Fixed-size concurrent batches (at most 5 calls in flight)
- Per-email failure isolation (failed calls degrade to REVIEW)
- Model availability checks with fallback to the first installed model

Architecture: FastAPI boundary + httpx Ollama client + pure session transitions
"""

__version__ = "0.1.0"
