"""
Order Status Constants

Order statuses and the transition table enforced when an order's
status changes.
"""

DRAFT = 'draft'
SUBMITTED = 'submitted'
RECEIVED = 'received'

ORDER_STATUSES = (DRAFT, SUBMITTED, RECEIVED)

# Statuses a brand new order may be saved with
INITIAL_STATUSES = {DRAFT, SUBMITTED}

# from-status -> statuses it may move to
STATUS_TRANSITIONS = {
    DRAFT: {SUBMITTED},
    SUBMITTED: {DRAFT, RECEIVED},
    RECEIVED: {SUBMITTED},
}

# Single-step action offered on the order detail page: (target status, label)
NEXT_ACTIONS = {
    DRAFT: (SUBMITTED, 'Submit Order'),
    SUBMITTED: (RECEIVED, 'Mark as Received'),
    RECEIVED: (SUBMITTED, 'Mark as Submitted'),
}
