"""
Integration tests for Review Analyzer.

The FastAPI app end to end (TestClient), with the hosted inference API and
the reviews file server replaced by httpx.MockTransport.
"""
