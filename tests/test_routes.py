"""HTTP layer: JSON pages, form posts and redirects."""

from models import Order, OrderTemplate


def test_dashboard(client):
    response = client.get('/')
    assert response.status_code == 200
    assert response.get_json()['total_orders'] == 0


def test_supplier_add_and_list(client):
    response = client.post('/suppliers', data={'name': 'Farm', 'contactInfo': 'Sam'})
    assert response.status_code == 200
    assert response.get_json()['success'] is True

    suppliers = client.get('/suppliers').get_json()['suppliers']
    assert suppliers[0]['name'] == 'Farm'
    assert suppliers[0]['contact_info'] == 'Sam'


def test_supplier_add_validation_error(client):
    response = client.post('/suppliers', data={'name': ''})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Name is required'}


def test_supplier_delete_blocked(client, make_ingredient):
    ingredient = make_ingredient()
    response = client.post(f'/suppliers/{ingredient.supplier_id}/delete')
    assert response.status_code == 400


def test_ingredient_add(client, make_supplier):
    supplier = make_supplier()
    response = client.post('/ingredients', data={
        'name': 'Kale', 'unit': 'bunch', 'defaultPrice': '1.75',
        'category': 'Produce', 'supplierId': supplier.id,
    })
    assert response.status_code == 200

    ingredients = client.get('/ingredients').get_json()['ingredients']
    assert ingredients[0]['default_price'] == '1.75'


def test_order_add_redirects_to_detail(client, make_ingredient):
    ingredient = make_ingredient()

    response = client.post('/orders', json={
        'status': 'draft',
        'notes': '',
        'items': [{'ingredientId': ingredient.id, 'quantity': 2.5,
                   'unitPrice': 6.8, 'totalPrice': 17}],
    })

    order = Order.query.one()
    assert response.status_code == 302
    assert response.headers['Location'].endswith(f'/orders/{order.id}')

    detail = client.get(f'/orders/{order.id}').get_json()
    assert detail['total_amount'] == '17.00'


def test_order_add_rejects_empty_order(client):
    response = client.post('/orders', json={'status': 'draft', 'items': []})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Order must have at least one item'}


def test_order_add_with_non_object_body(client):
    response = client.post('/orders', json=['not', 'an', 'order'])
    assert response.status_code == 400


def test_order_detail_not_found(client):
    assert client.get('/orders/99').status_code == 404


def test_order_status_and_delete(client, make_ingredient, make_order):
    order = make_order([(make_ingredient(), '1', '1')])

    response = client.post(f'/orders/{order.id}/status', data={'status': 'submitted'})
    assert response.get_json() == {'success': True, 'status': 'submitted'}

    response = client.post(f'/orders/{order.id}/status', data={'status': 'draft'})
    assert response.status_code == 200

    response = client.post(f'/orders/{order.id}/status', data={'status': 'received'})
    assert response.status_code == 400

    response = client.post(f'/orders/{order.id}/delete')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/orders')
    assert client.get('/orders').get_json() == {'orders': []}


def test_new_order_from_template(client, make_ingredient, make_template):
    ingredient = make_ingredient(default_price='2.00')
    template = make_template('Weekly', [(ingredient, '3')])

    response = client.post(f'/orders/new/template/{template.id}')

    assert response.status_code == 200
    assert response.get_json()['total'] == '6.00'
    assert client.post('/orders/new/template/999').status_code == 404


def test_template_add_and_delete(client, make_ingredient):
    ingredient = make_ingredient()

    response = client.post('/templates', json={
        'name': 'Weekly', 'description': '',
        'items': [{'ingredientId': ingredient.id, 'quantity': 2}],
    })
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/templates')

    template = OrderTemplate.query.one()
    assert client.get('/templates').get_json()['templates'][0]['name'] == 'Weekly'
    assert client.get('/templates/new').get_json()['groups']['Produce'][0]['id'] == ingredient.id

    response = client.post(f'/templates/{template.id}/delete')
    assert response.get_json() == {'success': True}


def test_new_order_page(client, make_ingredient):
    make_ingredient()
    page = client.get('/orders/new').get_json()
    assert list(page['groups']) == ['Produce']


def test_ingredients_category_filter(client, make_ingredient):
    make_ingredient('Milk', category='Dairy')
    make_ingredient('Kale')

    page = client.get('/ingredients?category=Dairy').get_json()

    assert [i['name'] for i in page['ingredients']] == ['Milk']
    assert list(page['groups']) == ['Dairy']
    assert len(client.get('/ingredients').get_json()['ingredients']) == 2


def test_order_add_with_non_object_item(client):
    response = client.post('/orders', json={'status': 'draft', 'items': ['x']})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Each item needs an ingredient'}
