"""Menu activities.

Modules:
- student_info.py: static profile card
- grade_evaluator.py: grade average and pass/fail remark
- triangle.py: asterisk triangle printer
- currency_exchange.py: PHP conversion calculator
"""
