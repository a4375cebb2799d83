"""ResearchAI backend: turns research papers into presentations, podcasts and summaries."""

__version__ = "0.1.0"
