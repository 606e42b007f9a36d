import pytest

from price_proxy.config.settings import Settings


@pytest.fixture
def product_page_html() -> str:
    return """
    <html>
    <head><title>C85934 | LCSC Electronics</title></head>
    <body>
    <div class="product-info">
        <table class="info-table">
            <tr><td>Manufacturer</td><td>Yageo</td></tr>
            <tr><td>Package</td><td>0603</td></tr>
        </table>
    </div>
    <div class="price-section">
        <table class="v-table priceTable">
            <thead>
                <tr><th>Qty.</th><th>Unit Price</th><th>Ext. Price</th></tr>
            </thead>
            <tbody>
                <tr>
                    <td>Standard Packaging: 5,000</td>
                    <td>$0.0008</td>
                    <td>$4.00</td>
                </tr>
                <tr>
                    <td>100</td>
                    <td>$0.0041</td>
                    <td>$0.41</td>
                </tr>
                <tr>
                    <td>1,000+</td>
                    <td><span class="origin">$0.0025</span> <span class="discount">$0.0019</span></td>
                    <td>$1.90</td>
                </tr>
                <tr>
                    <td>5,000+</td>
                    <td>$0.0016</td>
                    <td>$8.00</td>
                </tr>
            </tbody>
        </table>
    </div>
    </body>
    </html>
    """


@pytest.fixture
def empty_price_table_html() -> str:
    return """
    <html><body>
    <table class="priceTable">
        <tr><td>Standard Packaging, 500 units</td><td>$0.10</td></tr>
        <tr><td>N/A</td><td>$0.20</td></tr>
        <tr><td>10+</td><td>Call for price</td></tr>
        <tr><td>only one cell</td></tr>
    </table>
    </body></html>
    """


@pytest.fixture
def no_price_table_html() -> str:
    return """
    <html><body>
    <table class="specs"><tr><td>10+</td><td>$0.50</td></tr></table>
    <div class="priceTable"><span>$1.00</span></div>
    </body></html>
    """


@pytest.fixture
def settings() -> Settings:
    return Settings(
        lcsc_product_url="https://lcsc.test/product-detail/{part}.html",
        fetch_timeout_ms=1000,
        fetch_max_retries=0,
    )
