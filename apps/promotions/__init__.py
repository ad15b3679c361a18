"""
Promotions app for the Newsroom CMS.

Breaking and pinned promotions, trending scores and the live surfaces.
"""
