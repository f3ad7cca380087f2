"""content_type_hub domain layer.

Pure configuration-merging logic and the host protocol it depends on. Domain
modules never import from ``content_type_hub.host`` or
``content_type_hub.orchestration``; hosts are injected.
"""
