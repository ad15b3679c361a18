"""
Articles app for the Newsroom CMS.

Provides the article aggregate, body formatting, the publish gate and the
transactional write path.
"""
