from django.contrib import admin

from modules.subscribers.models import Subscriber, Subscription


class SubscriptionInline(admin.TabularInline):
    model = Subscription
    extra = 0
    autocomplete_fields = ("product",)


@admin.register(Subscriber)
class SubscriberAdmin(admin.ModelAdmin):
    list_display = ("first_name", "last_name", "joined_date")
    search_fields = ("first_name", "last_name")
    readonly_fields = ("joined_date", "created_at", "updated_at")
    inlines = (SubscriptionInline,)
