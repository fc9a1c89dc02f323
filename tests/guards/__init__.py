"""
Guard Test Suite

This package contains the Zero False Positive Guard tests for the inclusive language rules.

Each guard test class proves two things:
1. The guard prevents a false positive for a specific construction
2. The guard does not create false negatives for the real cases

Guards implemented:
- Guard 1: "crazy" - to go crazy
- Guard 2: "crazy" - to drive crazy
- Guard 3: "crazy" - to (not) be crazy about
- Guard 4: "crazy" - crazy in love
- Guard 5: Standalone noun phrases - the mentally ill, the disabled
"""
