"""Collaborators around the seating engine: building catalog, player roster,
alliance-city configuration, text listings and the Pillow renderer."""
