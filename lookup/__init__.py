"""Core lookup logic for the License Lookup Relay.

Builds upstream requests for the Illinois, Colorado and California licensing
registries and normalizes their responses. Nothing in this package depends
on the HTTP layer in ``relay``.
"""
