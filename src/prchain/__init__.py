"""prchain - split large in-progress work into a chain of bounded-size branches.

Architecture:
- git/: git subprocess calls (diff stats, branches, commits)
- chain/: parent resolution, change metric, threshold gate, naming, workflows, session
- watch.py: polling edit trigger with debounce
- ui/: terminal output and prompts
- config/: layered YAML configuration
"""
