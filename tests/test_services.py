import httpx

from asaas import (
    ChargesAPI,
    CustomersAPI,
    FinanceAPI,
    PixAPI,
    new_charges,
    new_customers,
    new_finance,
    new_pix,
)


def test_constructors_build_bound_services(config):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"balance": 1}))
    for factory, cls in ((new_customers, CustomersAPI), (new_charges, ChargesAPI),
                         (new_pix, PixAPI), (new_finance, FinanceAPI)):
        service = factory(config, transport=transport)
        try:
            assert isinstance(service, cls)
            assert service.client.config is config
        finally:
            service.client.close()


def test_constructor_passes_client_options(config):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"balance": 2})

    finance = new_finance(config, retries=2, transport=httpx.MockTransport(handler))
    try:
        assert finance.client.retries == 2
        assert finance.balance().balance == 2
        assert seen[0].url.path == "/api/v3/finance/balance"
    finally:
        finance.client.close()
