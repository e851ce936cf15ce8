"""Race domain services.

Routes and socket handlers call into these modules; transport concerns
(request parsing, JSON rendering, session cookies) stay out of here.
"""
