"""
The APP layer holds the ephemeral session state shared by the views.
"""
