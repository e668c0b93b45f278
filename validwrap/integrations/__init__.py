"""Host Integrations

Adapters between validated wrappers and the frameworks that feed them input.
Nothing in ``validwrap.errors`` or ``validwrap.validation`` imports this
package; import the adapter you need explicitly.

- form: decode form-urlencoded values before textual construction
- pydantic: use wrapper types as pydantic model fields
"""
