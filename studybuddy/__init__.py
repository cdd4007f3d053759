"""StudyBuddy: course document indexing, retrieval and grounded chat."""

__version__ = "0.1.0"
