# ABOUTME: Tools package for roster analysis utilities.
# ABOUTME: Contains the counter suggester, team weakness matrix, and move and item recommenders.

from paldeaplanner.tools.counter_suggester import (
    CounterVerdict,
    counter_verdict,
    score_counter,
    suggest_counters,
    suggest_replacement,
)
from paldeaplanner.tools.item_recommender import RecommendedItem, recommend_items
from paldeaplanner.tools.move_recommender import recommend_moves
from paldeaplanner.tools.weakness_matrix import team_weakness_matrix

__all__ = [
    "CounterVerdict",
    "RecommendedItem",
    "counter_verdict",
    "recommend_items",
    "recommend_moves",
    "score_counter",
    "suggest_counters",
    "suggest_replacement",
    "team_weakness_matrix",
]
