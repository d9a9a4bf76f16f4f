"""Public JDK types with the number of type parameters each declares.

These seed the resolver's known types, so wildcard imports such as
``import java.util.*;`` resolve the names they bring in.
"""


def _package(name: str, types: dict[str, int]) -> dict[str, int]:
    return {f"{name}.{simple}": arity for simple, arity in types.items()}


JAVA_LANG = _package(
    "java.lang",
    {
        "Appendable": 0, "ArithmeticException": 0,
        "ArrayIndexOutOfBoundsException": 0, "ArrayStoreException": 0,
        "AssertionError": 0, "AutoCloseable": 0, "Boolean": 0, "Byte": 0,
        "CharSequence": 0, "Character": 0, "Class": 1, "ClassCastException": 0,
        "ClassLoader": 0, "ClassNotFoundException": 0, "CloneNotSupportedException": 0,
        "Cloneable": 0, "Comparable": 1, "Deprecated": 0, "Double": 0, "Enum": 1,
        "Error": 0, "Exception": 0, "Float": 0, "FunctionalInterface": 0,
        "IllegalAccessException": 0, "IllegalArgumentException": 0,
        "IllegalStateException": 0, "IndexOutOfBoundsException": 0,
        "InstantiationException": 0, "Integer": 0, "InterruptedException": 0,
        "Iterable": 1, "LinkageError": 0, "Long": 0, "Math": 0,
        "NegativeArraySizeException": 0, "NoSuchFieldException": 0,
        "NoSuchMethodException": 0, "NullPointerException": 0, "Number": 0,
        "NumberFormatException": 0, "Object": 0, "OutOfMemoryError": 0,
        "Override": 0, "Process": 0, "ProcessBuilder": 0, "Readable": 0,
        "Record": 0, "ReflectiveOperationException": 0, "Runnable": 0,
        "Runtime": 0, "RuntimeException": 0, "SafeVarargs": 0,
        "SecurityException": 0, "Short": 0, "StackOverflowError": 0,
        "StackTraceElement": 0, "StrictMath": 0, "String": 0, "StringBuffer": 0,
        "StringBuilder": 0, "StringIndexOutOfBoundsException": 0,
        "SuppressWarnings": 0, "System": 0, "Thread": 0, "ThreadGroup": 0,
        "ThreadLocal": 1, "Throwable": 0, "UnsupportedOperationException": 0,
        "Void": 0,
    },
)  # fmt: skip

JAVA_UTIL = _package(
    "java.util",
    {
        "AbstractCollection": 1, "AbstractList": 1, "AbstractMap": 2,
        "AbstractQueue": 1, "AbstractSet": 1, "ArrayDeque": 1, "ArrayList": 1,
        "Arrays": 0, "Base64": 0, "BitSet": 0, "Calendar": 0, "Collection": 1,
        "Collections": 0, "Comparator": 1, "ConcurrentModificationException": 0,
        "Currency": 0, "Date": 0, "Deque": 1, "Dictionary": 2, "DoubleSummaryStatistics": 0,
        "EnumMap": 2, "EnumSet": 1, "Enumeration": 1, "EventListener": 0,
        "EventObject": 0, "Formatter": 0, "GregorianCalendar": 0, "HashMap": 2,
        "HashSet": 1, "Hashtable": 2, "IdentityHashMap": 2,
        "IllegalFormatException": 0, "IntSummaryStatistics": 0, "Iterator": 1,
        "LinkedHashMap": 2, "LinkedHashSet": 1, "LinkedList": 1, "List": 1,
        "ListIterator": 1, "Locale": 0, "LongSummaryStatistics": 0, "Map": 2,
        "Map.Entry": 2, "MissingResourceException": 0, "NavigableMap": 2,
        "NavigableSet": 1, "NoSuchElementException": 0, "Objects": 0,
        "Optional": 1, "OptionalDouble": 0, "OptionalInt": 0, "OptionalLong": 0,
        "PriorityQueue": 1, "Properties": 0, "Queue": 1, "Random": 0,
        "RandomAccess": 0, "ResourceBundle": 0, "Scanner": 0, "Set": 1,
        "SortedMap": 2, "SortedSet": 1, "Spliterator": 1, "Stack": 1,
        "StringJoiner": 0, "StringTokenizer": 0, "TimeZone": 0, "Timer": 0,
        "TimerTask": 0, "TreeMap": 2, "TreeSet": 1, "UUID": 0, "Vector": 1,
        "WeakHashMap": 2,
    },
)  # fmt: skip

JAVA_UTIL_FUNCTION = _package(
    "java.util.function",
    {
        "BiConsumer": 2, "BiFunction": 3, "BiPredicate": 2, "BinaryOperator": 1,
        "BooleanSupplier": 0, "Consumer": 1, "DoubleFunction": 1,
        "DoubleSupplier": 0, "DoubleUnaryOperator": 0, "Function": 2,
        "IntBinaryOperator": 0, "IntConsumer": 0, "IntFunction": 1,
        "IntPredicate": 0, "IntSupplier": 0, "IntUnaryOperator": 0,
        "LongFunction": 1, "LongSupplier": 0, "Predicate": 1, "Supplier": 1,
        "ToDoubleFunction": 1, "ToIntFunction": 1, "ToLongFunction": 1,
        "UnaryOperator": 1,
    },
)  # fmt: skip

JAVA_UTIL_CONCURRENT = _package(
    "java.util.concurrent",
    {
        "BlockingQueue": 1, "Callable": 1, "CompletableFuture": 1,
        "CompletionStage": 1, "ConcurrentHashMap": 2, "ConcurrentLinkedQueue": 1,
        "ConcurrentMap": 2, "CopyOnWriteArrayList": 1, "CountDownLatch": 0,
        "ExecutionException": 0, "Executor": 0, "ExecutorService": 0,
        "Executors": 0, "Future": 1, "LinkedBlockingQueue": 1,
        "ScheduledExecutorService": 0, "ScheduledFuture": 1, "Semaphore": 0,
        "ThreadLocalRandom": 0, "TimeUnit": 0, "TimeoutException": 0,
    },
)  # fmt: skip

JAVA_UTIL_STREAM = _package(
    "java.util.stream",
    {
        "Collector": 3, "Collectors": 0, "DoubleStream": 0, "IntStream": 0,
        "LongStream": 0, "Stream": 1, "StreamSupport": 0,
    },
)  # fmt: skip

JAVA_IO = _package(
    "java.io",
    {
        "BufferedReader": 0, "BufferedWriter": 0, "Closeable": 0, "File": 0,
        "FileNotFoundException": 0, "FileReader": 0, "FileWriter": 0,
        "Flushable": 0, "InputStream": 0, "InputStreamReader": 0,
        "IOException": 0, "OutputStream": 0, "OutputStreamWriter": 0,
        "PrintStream": 0, "PrintWriter": 0, "Reader": 0, "Serializable": 0,
        "StringReader": 0, "StringWriter": 0, "UncheckedIOException": 0,
        "Writer": 0,
    },
)  # fmt: skip

JAVA_OTHER = {
    "java.math.BigDecimal": 0,
    "java.math.BigInteger": 0,
    "java.math.RoundingMode": 0,
    "java.nio.charset.Charset": 0,
    "java.nio.charset.StandardCharsets": 0,
    "java.nio.file.Files": 0,
    "java.nio.file.Path": 0,
    "java.nio.file.Paths": 0,
    "java.time.Duration": 0,
    "java.time.Instant": 0,
    "java.time.LocalDate": 0,
    "java.time.LocalDateTime": 0,
    "java.time.LocalTime": 0,
    "java.time.ZoneId": 0,
    "java.time.ZonedDateTime": 0,
    "java.util.regex.Matcher": 0,
    "java.util.regex.Pattern": 0,
    "java.net.URI": 0,
    "java.net.URL": 0,
}

JDK_TYPES: dict[str, int] = {
    **JAVA_LANG,
    **JAVA_UTIL,
    **JAVA_UTIL_FUNCTION,
    **JAVA_UTIL_CONCURRENT,
    **JAVA_UTIL_STREAM,
    **JAVA_IO,
    **JAVA_OTHER,
}
