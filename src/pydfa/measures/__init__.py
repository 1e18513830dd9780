from pydfa.measures.tables import final_state_counts, reachable_states, transition_matrix

__all__ = ["final_state_counts", "reachable_states", "transition_matrix"]
