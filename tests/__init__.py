"""
Tests for GuMap

Organized by concern:
- test_config.py: policy normalization and the immutability implication
- test_config_loader.py: policies from JSON config files
- test_gu_map.py: access surfaces, bridge names, iteration, mapping protocol
- test_immutability.py: immutable_properties / immutable_map modes
- test_missing_keys.py: error_on_missing_key
- test_bypass_prevention.py: no alternate pathway around the policy
"""
