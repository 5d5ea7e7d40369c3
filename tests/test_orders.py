"""Order creation, status transitions and deletion."""

from decimal import Decimal

import pytest

from models import db, Order, OrderItem
from services import (
    Redirect, can_transition, next_action, create_order, update_order_status, delete_order,
)


def _item(ingredient, quantity='2.5', unit_price='6.80', total_price=None):
    item = {'ingredientId': ingredient.id, 'quantity': quantity, 'unitPrice': unit_price}
    if total_price is not None:
        item['totalPrice'] = total_price
    return item


def test_create_order_redirects_to_new_order(app, make_ingredient):
    ingredient = make_ingredient()

    with pytest.raises(Redirect) as exc:
        create_order('draft', 'Deliver before noon', [_item(ingredient, total_price='17.00')])

    order = Order.query.one()
    assert exc.value.endpoint == 'order_detail'
    assert exc.value.values == {'order_id': order.id}
    assert exc.value.message == f'Order #{order.id} created'
    assert order.status == 'draft'
    assert order.notes == 'Deliver before noon'
    assert order.total_amount == Decimal('17.00')
    assert len(order.items) == 1
    assert order.items[0].total_price == Decimal('17.00')


def test_order_total_is_sum_of_recomputed_line_totals(app, make_ingredient):
    tomatoes = make_ingredient('Tomatoes')
    cream = make_ingredient('Cream', unit='qt', category='Dairy')

    with pytest.raises(Redirect):
        create_order('submitted', '', [
            _item(tomatoes, '2.5', '6.80'),
            {'ingredient_id': cream.id, 'quantity': 3, 'unit_price': 4.15},
        ])

    order = Order.query.one()
    assert order.status == 'submitted'
    assert order.notes is None
    assert order.total_amount == Decimal('29.45')


def test_line_total_mismatch_is_rejected(app, make_ingredient):
    ingredient = make_ingredient()

    result = create_order('draft', '', [_item(ingredient, total_price='20.00')])

    assert result == {'error': 'Item total does not match quantity × unit price'}
    assert Order.query.count() == 0


def test_order_needs_items(app):
    assert create_order('draft', '', []) == {'error': 'Order must have at least one item'}
    assert create_order('draft', '', None) == {'error': 'Order must have at least one item'}


@pytest.mark.parametrize('quantity', ['0', '-1', 'lots', None])
def test_item_quantity_must_be_positive(app, make_ingredient, quantity):
    ingredient = make_ingredient()
    result = create_order('draft', '', [_item(ingredient, quantity=quantity)])
    assert result == {'error': 'Item quantities must be greater than zero'}


def test_item_price_must_be_non_negative(app, make_ingredient):
    ingredient = make_ingredient()
    result = create_order('draft', '', [_item(ingredient, unit_price='-2')])
    assert result == {'error': 'Item unit prices must be non-negative amounts'}


def test_item_needs_ingredient(app):
    result = create_order('draft', '', [{'quantity': '1', 'unitPrice': '1'}])
    assert result == {'error': 'Each item needs an ingredient'}


def test_unknown_ingredient_rejects_whole_order(app, make_ingredient):
    ingredient = make_ingredient()

    result = create_order('draft', '', [
        _item(ingredient),
        {'ingredientId': 999, 'quantity': '1', 'unitPrice': '1'},
    ])

    assert result == {'error': 'Order contains an unknown ingredient'}
    assert Order.query.count() == 0
    assert OrderItem.query.count() == 0


@pytest.mark.parametrize('status', ['received', 'cancelled', ''])
def test_invalid_initial_status(app, make_ingredient, status):
    ingredient = make_ingredient()
    result = create_order(status, '', [_item(ingredient)])
    assert result == {'error': f'Invalid order status: {status}'}
    assert Order.query.count() == 0


@pytest.mark.parametrize('current,new,allowed', [
    ('draft', 'submitted', True),
    ('draft', 'received', False),
    ('submitted', 'received', True),
    ('submitted', 'draft', True),
    ('received', 'submitted', True),
    ('received', 'draft', False),
    ('draft', 'draft', False),
])
def test_can_transition(current, new, allowed):
    assert can_transition(current, new) is allowed


def test_next_action():
    assert next_action('draft') == {'status': 'submitted', 'label': 'Submit Order'}
    assert next_action('submitted') == {'status': 'received', 'label': 'Mark as Received'}
    assert next_action('received') == {'status': 'submitted', 'label': 'Mark as Submitted'}
    assert next_action('lost') is None


def test_update_order_status_walks_the_lifecycle(app, make_ingredient, make_order):
    order = make_order([(make_ingredient(), '1', '2.50')])

    assert update_order_status(order.id, 'submitted') == {'success': True, 'status': 'submitted'}
    assert update_order_status(order.id, 'Received') == {'success': True, 'status': 'received'}
    assert db.session.get(Order, order.id).status == 'received'

    assert update_order_status(order.id, 'submitted') == {'success': True, 'status': 'submitted'}
    assert db.session.get(Order, order.id).status == 'submitted'


def test_draft_cannot_jump_to_received(app, make_ingredient, make_order):
    order = make_order([(make_ingredient(), '1', '2.50')])

    result = update_order_status(order.id, 'received')

    assert result == {'error': 'Cannot change order status from draft to received'}
    assert db.session.get(Order, order.id).status == 'draft'


def test_update_status_rejects_unknown_status(app, make_ingredient, make_order):
    order = make_order([(make_ingredient(), '1', '2.50')])
    assert update_order_status(order.id, 'shipped') == {'error': 'Invalid order status: shipped'}


def test_update_status_of_missing_order(app):
    assert update_order_status(404, 'submitted') == {'error': 'Failed to update order status'}


def test_status_change_keeps_totals(app, make_ingredient, make_order):
    order = make_order([(make_ingredient(), '2', '3.00')], status='submitted')
    update_order_status(order.id, 'received')
    assert db.session.get(Order, order.id).total_amount == Decimal('6.00')


def test_delete_order_removes_items(app, make_ingredient, make_order):
    order = make_order([(make_ingredient('A'), '1', '1'), (make_ingredient('B'), '2', '1')])
    order_id = order.id

    with pytest.raises(Redirect) as exc:
        delete_order(order_id)

    assert exc.value.endpoint == 'orders_list'
    assert exc.value.message == f'Order #{order_id} deleted'
    assert Order.query.count() == 0
    assert OrderItem.query.count() == 0


def test_delete_missing_order(app):
    assert delete_order(3) == {'error': 'Failed to delete order'}


def test_total_amount_is_exact_sum_of_lines(app, make_ingredient):
    butter = make_ingredient('Butter', category='Dairy')
    saffron = make_ingredient('Saffron', category='Dry Goods')

    with pytest.raises(Redirect):
        create_order('draft', '', [
            {'ingredientId': butter.id, 'quantity': 2, 'unitPrice': '3.50', 'totalPrice': '7.00'},
            {'ingredientId': saffron.id, 'quantity': 1, 'unitPrice': '10.00'},
        ])

    order = Order.query.one()
    assert order.total_amount == Decimal('17.00')
    assert [(i.quantity, i.unit_price) for i in order.items] == [
        (Decimal('2'), Decimal('3.50')),
        (Decimal('1'), Decimal('10.00')),
    ]


@pytest.mark.parametrize('item', ['x', 7, None, ['ingredientId', 1]])
def test_non_mapping_item_is_a_validation_error(app, make_ingredient, item):
    ingredient = make_ingredient()
    result = create_order('draft', '', [_item(ingredient), item])
    assert result == {'error': 'Each item needs an ingredient'}
    assert Order.query.count() == 0


def test_decimal_comma_quantity_is_rejected(app, make_ingredient):
    ingredient = make_ingredient()
    result = create_order('draft', '', [_item(ingredient, quantity='1,5')])
    assert result == {'error': 'Item quantities must be greater than zero'}
