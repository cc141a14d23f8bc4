"""
Services Layer
Read-side services and data getters used by routes and the invoker.

Services should:
- Not modify core data models or business logic
- Be presentation-focused - used primarily by routes
- Can read from multiple data models to aggregate information
- Be stateless where possible
- Handle presentation-specific concerns (formatting, filtering for display, etc.)
"""

