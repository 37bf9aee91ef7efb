# ids of rows seeded in the order_status table
ORDER_STATUS_PENDING = 1

ORDER_STATUS_NAMES = {
    ORDER_STATUS_PENDING: "pending",
}
