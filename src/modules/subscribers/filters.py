import django_filters

from modules.subscribers.models import Subscriber


class SubscriberFilter(django_filters.FilterSet):
    firstName = django_filters.CharFilter(field_name="first_name", lookup_expr="icontains")
    lastName = django_filters.CharFilter(field_name="last_name", lookup_expr="icontains")

    class Meta:
        model = Subscriber
        fields = ["firstName", "lastName"]
