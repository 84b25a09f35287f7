import django_filters

from modules.products.models import Product


class ProductFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    underSale = django_filters.BooleanFilter(field_name="under_sale")

    class Meta:
        model = Product
        fields = ["name", "underSale"]
