from lispy.evaluation.evaluator import evaluate, eval_list
from lispy.evaluation.apply import apply, apply_closure

__all__ = ["evaluate", "eval_list", "apply", "apply_closure"]
