"""
Browser-driven scraping of the carrier tracking page.
"""
