"""
Presentation-side state for taiga-selector.

Presenters own the search state and publish it through observables;
viewmodels are the immutable snapshots they publish.
"""
