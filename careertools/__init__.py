"""Career Tools - keyword-weighted scoring engines for AI/ML job seekers."""

__version__ = "1.0.0"
